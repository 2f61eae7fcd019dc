from setuptools import find_packages, setup

setup(
    name="cuebin",
    version="0.1.0",
    description="Parse CUE sheets into a sector-level model of their BIN files and merge multi-file images",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"cuebin.cue": ["*.lark"]},
    install_requires=["lark>=1.1"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["cuebin=cuebin.cli:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)

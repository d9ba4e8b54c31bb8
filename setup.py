from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="matrixpath",
    version="0.3.0",
    author="matrixpath contributors",
    description="Escapable paths with matrix parameters and wildcard matching.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/networmix/matrixpath",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.9",
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest>=7.0"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["matrixpath=matrixpath.cli:main"]},
)

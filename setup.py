"""Sets up the package."""

from pathlib import Path

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# define a function that reads a file in this directory
read = lambda p: Path(Path(__file__).resolve().parent / p).read_text()

setup(
    name="indexed-dict",
    version="1.0.0",
    author="indexed-dict developers",
    description="Insertion-ordered dictionary with constant-time key lookup and positional access",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

    python_requires=">=3.8",
    install_requires=read("requirements.txt").splitlines(),
    extras_require={"test": ["pytest"]},

    packages=find_packages(where='src'),
    package_dir={'': 'src'},
)

from setuptools import setup, find_packages

setup(
    name="salted-bloom-filter",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.19.0",
        "mmh3>=3.0.0",
        "matplotlib>=3.3.0",
        "pytest>=6.0.0",
    ],
    description="A Bloom filter sized from capacity and false positive probability with pluggable hashing",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
)

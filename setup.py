from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="aspectgraph",
    version="0.1.0",
    author="aspectgraph contributors",
    description="Lightest exact-length paths through an aspect combination graph.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={
        "aspectgraph.data": ["*.json"],
        "aspectgraph.schemas": ["*.json"],
    },
    python_requires=">=3.10",
    install_requires=["networkx", "PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["aspectgraph=aspectgraph.cli:main"]},
)

from setuptools import find_namespace_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ordered-collections",
    version="1.0.0",
    description="Ordered containers that keep their elements sorted through every insertion, removal, and assignment.",
    packages=find_namespace_packages(include=["ordered_collections", "ordered_collections.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

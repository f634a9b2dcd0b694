import os
from setuptools import setup, find_packages

long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as readme:
        long_description = readme.read()

setup(
    name="typegraph",
    version="0.1.0",
    description="Compiles model declarations into GraphQL type descriptors.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["typegraph", "typegraph.*"]),
    include_package_data=True,
    install_requires=[
        "Django>=4.2.27",
        "graphene>=3.3",
        "graphql-core>=3.2",
        "graphql-relay>=3.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
)

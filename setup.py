"""
seqpipe: Lazy, Chainable Sequence Pipelines

Wraps any iterable and composes map/filter/slice/flatten/sort and more
into a pipeline that computes nothing until a terminal operation pulls
elements through it, one at a time.
"""

from setuptools import setup, find_packages

setup(
    name="seqpipe",
    version="1.0.0",
    description="Lazy, chainable sequence-transformation pipelines",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="seqpipe contributors",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*", "benchmarks"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
    ],
)

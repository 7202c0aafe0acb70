# setup.py
from setuptools import setup, find_packages

setup(
    name="lispr",
    version="0.1.0",
    description="A small S-expression interpreter with lexical scoping",
    packages=find_packages(include=["lispr", "lispr.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispr = lispr.cli:main"],
    },
    zip_safe=False,
)

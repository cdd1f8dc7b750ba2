# setup.py - Package build
from setuptools import setup, find_packages

setup(
    name="category_paths",
    version="0.1.0",
    description="Cost-optimal paths through categories of objects and morphisms",
    packages=find_packages(include=["category_paths", "category_paths.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
)

"""
Setup script for the app_scripts package.
"""
from setuptools import setup, find_packages

setup(
    name="app-scripts",
    version="0.1.0",
    description="Build helper scripts for hybrid Angular/Cordova mobile apps",
    author="App Scripts Maintainers",
    author_email="user@example.com",
    url="https://github.com/username/app-scripts",
    packages=find_packages(include=["app_scripts", "app_scripts.*"]),
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "app-scripts=app_scripts.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)

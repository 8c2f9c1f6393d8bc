"""Setup script for the proxygraph package."""

from setuptools import find_packages, setup

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="proxygraph",
    version="0.1.0",
    description="Replace remote service endpoints in recorded call results with recording proxies.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["proxygraph", "proxygraph.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.0",
        "typing-extensions",  # For enhanced typing on older interpreters
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pre-commit>=3.0.0",
            "black",  # Code formatter
            "isort",  # Import sorting
            "flake8",  # Linting
            "mypy",  # Type checking
            "pytest-cov",  # Coverage reporting
        ],
        "test": [
            "pytest>=7.0",
            "pytest-cov",  # Coverage reporting
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
)

"""
Setup configuration for Sheepshead package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="sheepshead-engine",
    version="0.1.0",
    description="Rules engine and rule-based computer players for Sheepshead (Jack-of-Diamonds)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Games/Entertainment",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pytest>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0.0",
        ],
        "dev": [
            "black>=21.0.0",
            "flake8>=3.9.0",
            "mypy>=0.910",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

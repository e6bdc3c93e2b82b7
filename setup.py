"""
Setup script for bunseki package.

Bunseki is a Python library and server that measures text and reports
linguistic features of Japanese text using morphological analysis.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="bunseki",
    version="0.1.0",
    author="Noyu Ritsuji",
    author_email="",
    description="Character/word counting and Japanese linguistic feature analysis",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/noyuri2z/bunseki",
    packages=find_packages(include=["bunseki", "bunseki.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing :: Linguistic",
        "Natural Language :: Japanese",
        "Natural Language :: English",
    ],
    python_requires=">=3.10",
    install_requires=[
        "sudachipy>=0.6.0,<0.7",
        "sudachidict_core>=20220729",
    ],
    extras_require={
        "mcp": [
            "mcp>=1.2.0,<2",
            "pydantic>=2.0.0",
        ],
        "web": [
            "fastapi>=0.100.0",
            "pydantic>=2.0.0",
            "uvicorn>=0.20.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "httpx>=0.24.0",
            "fastapi>=0.100.0",
            "mcp>=1.2.0,<2",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "bunseki-mcp=bunseki.mcp_server:main",
        ],
    },
    keywords=[
        "nlp",
        "japanese",
        "morphological analysis",
        "sudachi",
        "word count",
        "readability",
        "mcp",
    ],
)

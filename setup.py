# setup.py
from setuptools import setup, find_packages

setup(
    name="links_finder",
    version="0.1.0",
    description="Многопоточный обход ссылок сайта LinksFinder",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "requests>=2.31",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "aiohttp>=3.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "links-finder=links_finder.cli:cli",
        ],
    },
    python_requires=">=3.11",
)

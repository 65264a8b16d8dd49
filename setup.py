from setuptools import setup, find_packages

setup(
    name="fantasysfc",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=4.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fantasysfc=fantasysfc.cli:main",
        ],
    },
    description="Gaelic football fixtures and results scraper for fantasy teams",
)

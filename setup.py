# setup.py
from setuptools import setup, find_packages

setup(
    name="krawl",
    version="0.1.0",
    description="Depth-bounded same-site crawler that collects page titles and text",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"krawl.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "browser": ["playwright>=1.40"],
        "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
    },
    entry_points={
        "console_scripts": ["krawl=krawl.cli:cli"],
    },
    python_requires=">=3.11",
)

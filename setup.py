"""Setup script for quick installation."""

from setuptools import find_packages, setup

setup(
    name="market-layout",
    version="0.1.0",
    description="Grid and row layouts for compound and simple betting markets",
    author="Market Layout Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "click>=8.1.0",
        "rich>=13.5.0",
        "pydantic>=2.3.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "market-layout=market_layout.cli.inspect_markets:main",
        ],
    },
)

"""Setup configuration for Greppy Filters package."""

from setuptools import setup, find_packages

setup(
    name="greppy-filters",
    version="1.0.0",
    description="Search and filter engine for the Greppy code-intelligence dashboard",
    author="Alex",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pandas>=2.1.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "tenacity>=8.2.0",
        "fastapi>=0.110.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
        "server": [
            "uvicorn>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "greppy-filters-api=greppy_filters.api.main:run",
        ],
    },
)

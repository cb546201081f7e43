"""Setup script for SRP Insight"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="srp-insight",
    version="0.1.0",
    author="Naman Agarwal",
    author_email="",
    description="Dependency and Single Responsibility analysis for C#-like classes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"srp_insight.server": ["templates/*.html"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Quality Assurance",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.11",
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "serve": [
            "starlette>=0.36.0",
            "uvicorn>=0.27.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
            "starlette>=0.36.0",
            "uvicorn>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "srp-insight=srp_insight.cli:app",
        ],
    },
    keywords="code-quality static-analysis csharp single-responsibility dependency-injection",
)

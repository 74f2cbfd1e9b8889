from setuptools import setup, find_packages
from pathlib import Path

# Read README.md if available (for development installs)
# For wheel builds, use a fallback description
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
else:
    long_description = "Validated interactive input: prompt, parse, check against composable rules and re-prompt until the value is valid."

setup(
    name="promptguard",
    version="0.1.0",
    description="Validated interactive input with composable rules and fluent builders",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",  # asyncio.to_thread
    install_requires=[
        "pyyaml>=6.0",
        "jinja2>=3.0",  # Prompt templates
        "pydantic>=2.0.0",  # Console settings models
        "typer>=0.9.0",  # CLI and terminal output
    ],
    entry_points={
        "console_scripts": [
            "promptguard=promptguard.cli:main",
        ],
    },
    extras_require={
        "dev": [
            "pytest",
            "coverage",
            "hypothesis",
            "parameterized==0.9.0",
        ],
    },
)

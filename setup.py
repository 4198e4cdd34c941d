"""Setup configuration for neo-cache package."""

from pathlib import Path

from setuptools import setup, find_packages

ROOT = Path(__file__).parent

version = {}
exec((ROOT / "src" / "neo_cache" / "__version__.py").read_text(encoding="utf-8"), version)

readme_path = ROOT / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

TEST_REQUIRES = [
    "pytest>=7.0.0",
    "pytest-asyncio>=0.21.0",
    "pytest-cov>=4.0.0",
    "httpx>=0.24.0",
]

setup(
    name="neo-cache",
    version=version["__version__"],
    description="Two-tier (local + Redis) read-through cache in front of a keyed entity store",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="NeoFast Team",
    author_email="team@neofast.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.115.0",
        "asyncpg>=0.29.0",
        "redis>=5.0.1",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": TEST_REQUIRES,
        "dev": TEST_REQUIRES + [
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Framework :: FastAPI",
        "Framework :: AsyncIO",
        "Topic :: System :: Distributed Computing",
    ],
    keywords="cache redis read-through single-flight asyncpg fastapi",
)

"""Setup script for dengue-pro package following Cosmic Python pattern."""

from setuptools import setup, find_namespace_packages

setup(
    name="dengue-pro",
    version="1.0.0",
    description="Dengue Pro - case management and follow-up tracking for dengue surveillance",
    author="Dengue Pro Team",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["shared*", "staff*", "case*"]),
    py_modules=["config"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn[standard]",
        "pydantic",
        "sqlalchemy",
        "requests",
        "httpx",
        "python-multipart",
        "email-validator",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "httpx",
        ],
        "dev": [
            "black",
            "flake8",
            "mypy",
            "pre-commit",
        ],
    },
    entry_points={
        "console_scripts": [
            "dengue-pro-api=shared.entrypoints.app:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Healthcare Industry",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
    ],
)

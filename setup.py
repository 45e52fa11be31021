"""
Setup script for career-coach project.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_namespace_packages

setup(
    name="career-coach",
    version="0.3.0",
    packages=find_namespace_packages(
        include=["src", "src.*", "career_service", "career_service.*"]
    ),
    py_modules=["version"],
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "pymongo>=4.6",
        "langchain-core>=0.2",
        "langchain-openai>=0.1",
        "openai>=1.0",
        "json-repair>=0.25",
        "python-dotenv>=1.0",
    ],
    entry_points={
        "console_scripts": [
            "career-coach-api=career_service.app:main",
        ],
    },
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.26",
        ],
    },
)

from setuptools import setup, find_namespace_packages

setup(
    name="library_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['api*', 'cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "SQLAlchemy>=2.0",
        "psycopg2-binary",
        "alembic",
        "python-dotenv",
        "Click",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "library-catalog=cli.main:main",
        ],
    },
)

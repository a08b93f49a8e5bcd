from setuptools import setup, find_namespace_packages

setup(
    name="library_catalog",
    version="0.1.0",
    packages=find_namespace_packages(include=['catalog*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "SQLAlchemy>=2.0",
        "alembic",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)

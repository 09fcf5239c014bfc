from setuptools import setup, find_namespace_packages

setup(
    name="sha1-text",
    version="1.0.0",
    packages=find_namespace_packages(include=["src", "src.*"]),
    install_requires=[
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sha1text=src.hashing.cli:main",
        ],
    },
)

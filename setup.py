from setuptools import setup, find_packages

setup(
    name="chatshelf",
    version="0.1.0",
    packages=find_packages(include=["chatshelf", "chatshelf.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "fastapi>=0.100",
        "uvicorn>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "chatshelf=chatshelf.main:main",
        ],
    },
)

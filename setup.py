from setuptools import find_packages, setup

setup(
    name="shopdash",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "requests",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "shopdash=shopdash.cli:cli",
        ],
    },
)

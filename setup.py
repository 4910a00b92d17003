from setuptools import setup, find_packages

setup(
    name="telnyx-storage",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.8.0",
        "xmltodict>=0.13.0",
        "python-dotenv>=1.0.0",
        "prometheus-client>=0.14.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.18.0",
        ],
    },
    python_requires=">=3.8",
)

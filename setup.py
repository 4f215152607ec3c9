from setuptools import setup, find_packages

setup(
    name="cfv2client",
    version="0.0.1",
    description="A small client for the Cloud Foundry v2 organizations and spaces API",
    license="Public Domain",
    packages=find_packages(exclude=["integration_tests*", "test"]),
    python_requires=">=3.7",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": ["mock", "pytest"],
    },
)

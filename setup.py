"""Install the Approov token check package."""

from setuptools import setup, find_packages

setup(
    name='approov-auth',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    install_requires=[
        "flask",
        "werkzeug",
        "pyjwt>=2",
        "python-json-logger",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False
)

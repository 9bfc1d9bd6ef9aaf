"""Install the authentication gate package."""

from setuptools import setup, find_packages

setup(
    name='authgate',
    version='0.1.0',
    packages=find_packages(exclude=['*test*']),
    py_modules=['wsgi'],
    install_requires=[
        "flask",
        "werkzeug",
        "requests",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False
)

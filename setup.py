#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name='fecresults',
    version='0.1.0',
    description='Generate FEC election results for a series of election years',
    packages=find_packages(),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
    ],
    extras_require={
        'test': [
            'mock>=4.0',
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'fecresults = fecresults.tasks:cli',
        ],
    }
)

#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='bezclip',
    version='0.1.0',
    description='Bezier curve intersections by Bezier clipping - '
                'curve/curve and curve/line',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'bezclip': 'sources/model',
    },
    packages=['bezclip'],
    package_data={
        'bezclip': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'matplotlib>=3.5',
    ],
    extras_require={
        'test': ['scipy>=1.7', 'pytest'],
    },
    python_requires='>=3.8',
)

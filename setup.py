# -*- coding: utf-8 -*-
import os.path

from setuptools import setup, find_packages

root = os.path.dirname(__file__)

with open(os.path.join(root, 'README.rst')) as f:
    readme = f.read()


setup(
    name="conflictmatch",
    version='0.1.0',
    description="Maximum bipartite matching for resolving two-sided preference conflicts.",
    long_description=readme,
    license='MIT',
    zip_safe=True,
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    install_requires=[],
    extras_require={
        'graphs': ['graphviz>=0.5'],
        'tests': [
            'pytest',
            'hypothesis',
            'hopcroftkarp>=1.2,<2.0',
        ],
    },
    entry_points={
        'console_scripts': ['catvsdog = conflictmatch.cli:main'],
    },
)

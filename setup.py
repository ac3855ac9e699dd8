#!/usr/bin/env python

from setuptools import setup

setup(
    name="esschema",
    version="0.1.0",
    description="Validate Elasticsearch index mappings against the schema an application expects",
    author="Wouter van Atteveldt",
    author_email="wouter@vanatteveldt.com",
    packages=["esschema"],
    include_package_data=True,
    zip_safe=False,
    keywords=["elasticsearch", "mapping", "schema", "validation"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Database",
    ],
    python_requires=">=3.10",
    install_requires=[
        "elasticsearch~=8.6",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
        "class-doc",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
        ]
    },
    entry_points={
        'console_scripts': [
            'esschema = esschema.__main__:main'
        ]
    },
)

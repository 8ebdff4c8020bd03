from setuptools import setup, find_packages

setup(
    name='reversible-id',
    version='1.0.0',
    description='Short, reversible, obfuscated string ids for integers, with Hashids and Sqids style codecs.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'pydantic>=2.0',
        'pydantic-settings>=2.0',
        'sqids>=0.4',
    ],
    extras_require={
        'test': ['pytest', 'hashids'],
    },
)

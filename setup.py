from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="uri3986",
    version='1.0.0',
    description="RFC 3986 URI reference parser",
    python_requires='>=3.8',
    install_requires=[
        'lark>=1.1',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'uri3986': ['*.ini']},
    entry_points={
        'console_scripts': [
            'uri3986 = uri3986.cli:main',
        ],
    },
    long_description=long_description,
    long_description_content_type='text/markdown'
)

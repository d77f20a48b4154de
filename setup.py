# Python version 3.10 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = ["pydantic>=2", "p2pd<5"]

setup(
    version='1.0.0',
    name='nth_from_end',
    description='remove the n-th node from the end of a singly linked list',
    keywords=('linked list two pointer'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    license='public domain',
    package_dir={"": "."},
    packages=find_packages(exclude=["tests"]),
    install_requires=install_reqs,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3'
    ],
)

import os
from setuptools import setup
import codecs

from _pfunctional_version import __version__

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with codecs.open(readme_path, encoding='utf8') as f:
    readme = f.read()

setup(
    name='pfunctional',
    version=__version__,
    description='Persistent collections and lazy single use streams',
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    py_modules=['_pfunctional_version'],
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    install_requires=['immutables>=0.18'],
    extras_require={
        'test': ['pytest', 'hypothesis'],
    },
    scripts=[],
    packages=['pfunctional'],
    package_data={'pfunctional': ['py.typed', '__init__.pyi', 'typing.pyi']},
    python_requires='>=3.8',
)

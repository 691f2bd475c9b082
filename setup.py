"""
Setup script for gltypes.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

Pure Python; numpy provides the scalar types and array storage.
"""

from setuptools import setup, find_packages


setup(
    name='gltypes',
    version='0.1.0',
    description='Fixed-size vectors, matrices and quaternions for shader uniforms',
    python_requires='>=3.9',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'numpy>=1.24',
    ],
    extras_require={
        'dev': [
            'pytest',
        ],
    },
)

"""Setup script for seqarrays package."""

from setuptools import setup, find_packages

setup(
    name='seqarrays',
    version='0.1',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'seqarrays.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'matplotlib>=3.3.0',
        'pyyaml>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'seqarrays-bench=seqarrays.benchmarks.cli:main',
        ],
    },
)

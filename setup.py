"""Setup script for eris package."""

from setuptools import setup, find_packages

setup(
    name="eris-prng",
    description="Pseudo-random number generators in pure Python",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    packages=find_packages(include=['eris', 'eris.*']),
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
)

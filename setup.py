"""Setup script for sigma-nizk-py package."""

from setuptools import setup, find_packages

setup(
    name="sigma-nizk-py",
    use_scm_version={"fallback_version": "0.1.0"},
    description="Sigma protocols and a generic Fiat-Shamir NIZK compiler",
    python_requires=">=3.8",
    packages=find_packages(),
    include_package_data=True,
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)

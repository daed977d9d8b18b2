from setuptools import setup, find_packages

setup(
    name="precision-root",
    version="0.1.0",
    description="Bracketing n-th order Brent root finding over arbitrary-precision reals",
    author="adamfilli",
    packages=find_packages(include=["precisionroot", "precisionroot.*"]),
    install_requires=[
        "mpmath",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
            "matplotlib",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)

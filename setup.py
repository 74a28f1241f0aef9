# setup.py
from setuptools import setup, find_packages

setup(
    name="gmath3d",
    version="1.0.0",
    description="GMath3D – vectors, matrices and quaternions for real-time 3D rendering",
    packages=find_packages(exclude=("testers", "examples")),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)

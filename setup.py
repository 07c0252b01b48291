# setup.py
from setuptools import setup, find_packages

setup(
    name="gravlens",
    version="1.0.0",
    description="Gravitational lensing visualizer with an amortized distortion-map cache",
    packages=find_packages(include=["gravlens", "gravlens.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "numba>=0.55.0",
        "Pillow>=9.0.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["gravlens=gravlens.__main__:main"],
    },
)

"""
Setup configuration for the surfmesh package.

Version 0.1.0 - Height-field and parametric surface triangulation with
finite-difference normals, OBJ/STL/PLY export and a command-line interface.
"""

from setuptools import find_packages, setup

setup(
    name="surfmesh",
    version="0.1.0",
    packages=find_packages(include=["surfmesh", "surfmesh.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "typer>=0.9.0",
        "rich>=12.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "surfmesh=surfmesh.cli:app",
        ],
    },
    description="Triangulated meshes for height-field and parametric surfaces",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Multimedia :: Graphics :: 3D Modeling",
    ],
    python_requires=">=3.8",
)

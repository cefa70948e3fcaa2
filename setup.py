from setuptools import setup, find_packages

setup(
    name="radonct",
    version="1.0.0",
    description="Parallel beam CT forward projection and filtered backprojection by image rotation",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "numpy",
        "numba",
        "torch",
        "scikit-image",
    ],
    extras_require={
        "test": ["pytest"],
        "examples": ["matplotlib"],
    },
    entry_points={
        "console_scripts": [
            "radonct=radonct.cli:main",
        ],
    },
    license="GPL-2.0-or-later",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Medical Science Apps",
    ],
    python_requires=">=3.10",
)

from setuptools import find_packages, setup

setup(
    name="merkle_air",
    version="0.1.0",
    description="A package to arithmetize Merkle inclusion claims as AIR constraint tables",
    url="https://github.com/yourusername/merkle_air",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "tx-engine",
        "elliptic_curves @ git+https://github.com/nchain-innovation/elliptic_curves.git",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.12",
)

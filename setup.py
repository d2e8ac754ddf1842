from setuptools import setup, find_packages

setup(
    name="imageset",
    version="0.1.0",
    description="Metadata extraction and filter expressions for image sets",
    packages=find_packages(include=["imageset", "imageset.*"]),
    python_requires=">=3.8",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "imageset=imageset.__main__:main",
        ],
    },
)

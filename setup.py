# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetbrowser",
    version="0.1.0",
    description="Scan folders and zip archives into sorted trees of categories and assets",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetbrowser*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'assetbrowser=assetbrowser.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

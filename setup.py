# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rn-translation-gen",
    version="0.1.0",
    description="Generate TypeScript translation key types and constants from JSON localization files",
    packages=find_namespace_packages(where="src", include=["rntranslationgen*"]),
    package_dir={"": "src"},
    package_data={"rntranslationgen": ["interface/locales/*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "PyYAML",  # Config files (rn-translation-gen.yml)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rn-translation-gen=rntranslationgen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

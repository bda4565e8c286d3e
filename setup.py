# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="schematree",
    version="1.0.0",
    description="Render JSON, JSONC, YAML and XML documents as ASCII directory trees",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["schematree", "schematree.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0",
        "json5>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'schematree=schematree.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeforge",
    version="1.2.0",
    description="Create directory structures from tree-like text",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeforge", "treeforge.*"]),
    install_requires=[
        "pyperclip",  # Clipboard input when no file is given
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeforge=treeforge.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

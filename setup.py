# setup.py
from pathlib import Path

from setuptools import setup, find_packages

# Version is defined here to avoid import issues during build
__version__ = "1.0.0"

readme = Path(__file__).parent / "README.md"

setup(
    name='favsync',
    version=__version__,
    description='FavSync - export, import and roll back host application favorites.',
    long_description=readme.read_text(encoding="utf-8") if readme.exists() else "",
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        'click>=8.1.0',
        'rich>=13.0.0',
        'PyYAML>=6.0',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'favsync = favsync.cli:cli',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Utilities",
    ],
    python_requires='>=3.10',
    keywords='favorites, navigation, export, import, rollback',
)

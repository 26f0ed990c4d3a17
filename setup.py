# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="installdirs",
    version="0.1.0",
    description="Resolve GNU installation directories (prefix, bindir, libdir, ...) with per-directory overrides",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["installdirs", "installdirs.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'installdirs=installdirs.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)

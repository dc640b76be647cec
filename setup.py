from setuptools import setup, find_packages

# All dependencies - single source of truth
install_requires = [
    "colorama>=0.4.6",
    "jsonschema>=4.19.0",
    "tomli>=2.0.1; python_version < '3.11'",
]

# Development dependencies
extras_require = {
    'test': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
    ],
    'dev': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
        'black>=23.7.0',
        'isort>=5.12.0',
        'mypy>=1.4.1',
        'flake8>=6.1.0',
    ]
}

setup(
    name="profilemutex",
    version="1.0.0",
    author="Lucas Richert",
    license='GNU GPLv3',
    author_email="info@lucasrichert.tech",
    description="Build-time rule enforcing mutually exclusive build profiles",
    packages=find_packages(include=["profilemutex", "profilemutex.*"]),
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "profilemutex=profilemutex.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)

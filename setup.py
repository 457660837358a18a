from setuptools import setup, find_packages

setup(
    name="dochelp",
    version="0.1.0b0",
    description="Doc-comment driven help text and fixed-width text tables for console applications",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "dochelp=dochelp.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)

from setuptools import setup, find_packages

setup(
    name="exactgauss",
    version="1.0",
    description="Exact Gaussian elimination over rational numbers",
    long_description=("Solves square and overdetermined linear systems with integer or rational coefficients "
                      "exactly, using Gaussian elimination and back-substitution over rational numbers"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "scipy", "sympy"],
    extras_require={"test": ["pytest", "pytest-timeout"]},
    entry_points={"console_scripts": ["exactgauss = exactgauss.cli:main"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear equations", "gaussian elimination", "rational arithmetic", "exact"],
    zip_safe=False,
)

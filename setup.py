import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="lightbench",
    version="0.1.0",
    author="lightbench developers",
    description="Deterministic 2d ray tracing of optical table layouts",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    keywords=['geometric optics', 'ray tracing', 'optical table',
              'polarization', 'jones calculus', 'gaussian beams'],
    install_requires=[
        "numpy>=1.15.0",
        "pandas>=0.23.4",
        "attrs>=18.1.0",
        ],
    extras_require={
        'test': ["pytest"],
    },
)

from setuptools import setup, find_packages

setup(
    name='gridcalc',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow'],  # Arrow table / CSV export of the evaluated grid
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'gridcalc=grid_calc.cli:main'  # Entry point to main function
        ]
    },
    author='GridCalc Team',
    description='Evaluates grids of postfix integer expressions and cell-referencing formulas',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    python_requires='>=3.8',
)

from setuptools import setup

setup(
    name='objmodel',
    version='0',
    packages=['objmodel'],
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    # # Uncomment to enable PEP-561 style type hinting and .pyi type hinting files.
    # package_data={
    #     # Conform to PEP-561
    #     'objmodel': ['py.typed']
    # },
    url='',
    license='',
    author='',
    author_email='',
    description='Runtime object model with single-inheritance classes, hidden-class instance layouts, and attribute hooks.'
)

from setuptools import setup


with open('README.rst', 'r') as f:
    long_desc = f.read()

setup(
    name='vcgraph',
    version='0.1.0',
    description='Generic graphs and exact and approximate minimum vertex cover algorithms',
    long_description=long_desc,
    long_description_content_type='text/x-rst',
    license='GPL-3.0-or-later',
    packages=['vcgraph'],
    install_requires=[
        'numpy>=1.17',
        'scipy>=1.6.0',
    ],
    extras_require={
        'test': ['pytest']
    },
    python_requires='>=3.9'
)

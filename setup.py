from setuptools import setup


with open('README.rst', 'r') as f:
    # skip the banners
    lines = f.readlines()[6:]
    long_desc = ''.join(lines)

setup(
    name='bilateral',
    version='1.0.0',
    description='Minimum vertex cover of bipartite graphs via Hopcroft-Karp and Koenig\'s theorem',
    long_description=long_desc,
    long_description_content_type='text/x-rst',
    license='BSD 2-Clause',
    packages=['bilateral'],
    install_requires=[
        'numpy>=1.9',
        'scipy>=1.4.0',
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ['bilateral=bilateral.projects:main'],
    },
    python_requires='>=3.9'
)

from setuptools import setup

setup(
    name='mediastream',
    version='0.1.0',
    description='Streaming parser for M3U/M3U8 playlists',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    author='',
    author_email='',
    license='MIT',
    platforms='ALL',
    packages=['mediastream', 'mediastream.utils'],
    python_requires='>=3.10',
    install_requires=[
        'pydantic>=2.0.0',
        'pydantic-settings',
        'PyYAML',
        'typer',
        'rich',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'mediastream=mediastream.cli:main',
        ],
    },
)

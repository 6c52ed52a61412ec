from setuptools import setup, find_packages

setup(
    name='redline',
    version='0.1',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'numpy >= 1.22.4',
    ],
    test_suite='tests',
    description='Z-score outlier classification and gradient segmentation for line charts.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires=">=3.10",
)

from setuptools import setup

setup(name='brewwater',
      version='0.1',
      description='Brewing water salt additions',
      long_description=open('README.md').read(),
      keywords=['homebrew', 'beer', 'water'],
      license='Apache 2.0',
      packages=['brewwater'],
      classifiers=[
          "Development Status :: 3 - Alpha",
          "Environment :: Console",
          "Topic :: Utilities",
          "License :: OSI Approved :: Apache Software License"
      ],
      install_requires=[
          "unit_parser",
          "numpy",
          "cvxpy"
      ],
      extras_require={
          'test': [
              "pytest",
              "scipy"
          ]
      },
      include_package_data=True,
      package_data={
          'brewwater': ['resources/*']
      },
      entry_points={
          'console_scripts': [
              'water_salts=brewwater.water_salts:main'
          ]
      },
      zip_safe=False)

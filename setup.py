from setuptools import setup

setup(name='dnsping',
      version='1.1.0',
      scripts=['dnsping'],
      description='DNS query latency measurement tool',
      author='Shumon Huque',
      author_email='shuque@gmail.com',
      packages=['dnspinglib'],
      python_requires='>=3.8',
      install_requires=['dnspython>=2.3', 'requests',],
      extras_require={'test': ['pytest',]},
      long_description = \
      """dnsping - ping-like DNS query latency measurement in Python.""",
      )

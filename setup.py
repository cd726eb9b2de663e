#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for params in ["Params2048", "ParamsMODP2048"]:
            S1 = "from srp6a import register, begin_handshake, complete_handshake, handshake, %s as p" % params
            S2 = "s, v = register(b'alice', b'password', params=p)"
            S3 = "A, a = begin_handshake(params=p)"
            S4 = "B, K = handshake(A, v, params=p)"
            S5 = "K = complete_handshake(A, a, b'alice', b'password', s, B, params=p)"

            register_t = do([S1], S2)
            server = do([S1, S2, S3], S4)
            full = do([S1, S2], ";".join([S3, S4, S5]))
            print("%-15s: register=%6s, server=%6s, full=%6s"
                  % (params, abbrev(register_t), abbrev(server), abbrev(full)))
cmdclass = {"speed": Speed}

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )

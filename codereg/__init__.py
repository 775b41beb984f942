"""CodeReg - student and hackathon registration with random team generation"""

__version__ = "1.0.0"

from .mongo import MongoODM

__all__ = ["MongoODM"]

from .autoconfiguration import DocketAutoConfiguration, DocketRegistration

__all__ = ['DocketAutoConfiguration', 'DocketRegistration']

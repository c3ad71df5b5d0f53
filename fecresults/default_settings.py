"""Default settings for fecresults, overridable with FECRESULTS_SETTINGS"""

YEARS = (2000, 2002, 2004, 2006, 2008, 2010, 2012, 2014)
"""Election years to generate results for, processed in this order"""

RESULTS_GENERATOR = 'fec_results_generator.JsonGenerator'
"""Dotted path to the class that generates results for a single year"""

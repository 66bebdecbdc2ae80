"""EisBER: announce the nearest aircraft overhead and the CO2 it burns."""

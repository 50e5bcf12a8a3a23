"""
Discrete-time CPU scheduling simulator: RR, SPN, SRT and HRRN policies.
"""

"""trebuchet — calibration value summing for a line-oriented document.

Each line's calibration value is its first and last digit read as a
two-digit number, where a digit is a numeral or a spelled-out "one".."nine"
(overlaps allowed: "twone" is 21). The program prints the sum over all lines.

Usage:
    python -m trebuchet                          # Sum res/data.txt
    python -m trebuchet breakdown                # Per-line table
"""

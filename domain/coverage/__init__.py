"""Coverage Bounded Context.

Responsible for radio coverage of structures by antennas:
- Value Objects: CoverageGrade
- Services: is_point_covered, count_covered_corners, grade, coverage_report
"""

"""
Job Board - Job postings, applications and profiles over a pluggable data store.

This package:
1. Filters active job postings by search text, location, job type and salary
2. Compares a job seeker's skills with each job's required skills
3. Gates applications on the job seeker holding every required skill
4. Lets employers post jobs, review applications and rate applicants
5. Stores records in memory, in local JSON files, or in a remote Supabase database
"""

__version__ = "1.0.0"
__author__ = "Job Board"

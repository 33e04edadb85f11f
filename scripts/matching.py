#!/usr/bin/env python3
"""
Offline skill-matching demo.
Ranks jobs from a JSON file against a skill list, no database needed.

Usage:
    python scripts/matching.py --jobs jobs.json --skills "Python, SQL"
"""

import argparse
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def load_jobs(jobs_path):
    """Read a JSON array of job objects."""
    from careerpath.data.models import Job

    with open(jobs_path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"{jobs_path} must contain a JSON array of jobs")

    jobs = [Job.model_validate(item) for item in raw]
    print(f"Loaded {len(jobs)} jobs from {jobs_path.name}")
    return jobs


def run_match(skills_text, jobs, top):
    from careerpath.core.matching import compute_matches
    from careerpath.core.skills import parse_skills

    skills = parse_skills(skills_text)
    print(f"Skills: {', '.join(skills)}")

    ranked = compute_matches(skills, jobs)

    print(f"\n{'Rank':<5} {'Title':<30} {'Company':<20} {'Match':<7} {'Level':<10}")
    print("-"*75)

    for i, m in enumerate(ranked[:top], 1):
        print(f"{i:<5} {m.job.title[:29]:<30} {m.job.company[:19]:<20} {m.match_percent:>3}%   {m.level.value:<10}")
        if m.missing_skills:
            print(f"      missing: {', '.join(m.missing_skills[:6])}")

    if len(ranked) > top:
        print(f"  ... and {len(ranked) - top} more jobs")

    # summary
    excellent = sum(1 for m in ranked if m.level.value == "excellent")
    good = sum(1 for m in ranked if m.level.value == "good")
    fair = sum(1 for m in ranked if m.level.value == "fair")
    print(f"\nSummary: {excellent} excellent, {good} good, {fair} fair")

    if ranked:
        print(f"Top match: {ranked[0].job.title} ({ranked[0].match_percent}%)")


def main():
    parser = argparse.ArgumentParser(description="Skill-Job Matching Demo")
    parser.add_argument("--jobs", type=Path, required=True, help="JSON file with a list of jobs")
    parser.add_argument("--skills", required=True, help="Comma-separated skills")
    parser.add_argument("--top", type=int, default=10, help="Number of matches to show")

    args = parser.parse_args()

    print("\n" + "="*60)
    print("CareerPath: Skill-Job Matching")
    print("="*60)

    try:
        jobs = load_jobs(args.jobs)
        run_match(args.skills, jobs, args.top)
    except KeyboardInterrupt:
        print("\nInterrupted.")
    except Exception as e:
        print(f"Error: {e}")
        raise


if __name__ == "__main__":
    main()

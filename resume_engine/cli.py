"""
Resume Engine CLI - Command line interface for resume analysis and job matching.

Usage:
    python -m resume_engine.cli [command] [options]

Commands:
    parse       Parse a resume into structured sections
    score       Calculate the ATS score of a resume
    match       Score a resume against one job posting
    rank        Rank job postings for a resume
    config      Manage configuration

Examples:
    python -m resume_engine.cli parse resume.txt --output resume.json
    python -m resume_engine.cli score resume.txt
    python -m resume_engine.cli match resume.txt --job job.json
    python -m resume_engine.cli rank resume.txt --jobs jobs.json --limit 10
"""

from dataclasses import replace
import argparse
import json
import sys

from resume_engine.core import JobPosting, ResumeEngine, StructuredResume
from resume_engine.utils import Config, configure_logging


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Resume Engine - Resume analysis, ATS scoring and job matching",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a resume")
    parse_parser.add_argument("resume", help="Resume file (.txt, .md or .json)")
    parse_parser.add_argument("--output", "-o", help="Output file (JSON)")

    # Score command
    score_parser = subparsers.add_parser("score", help="ATS score a resume")
    score_parser.add_argument("resume", help="Resume file (.txt, .md or .json)")
    score_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Match command
    match_parser = subparsers.add_parser("match", help="Match a resume against a job")
    match_parser.add_argument("resume", help="Resume file (.txt, .md or .json)")
    match_parser.add_argument("--job", "-j", required=True, help="Job posting file (JSON object)")
    match_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank jobs for a resume")
    rank_parser.add_argument("resume", help="Resume file (.txt, .md or .json)")
    rank_parser.add_argument("--jobs", "-j", required=True, help="Job postings file (JSON list)")
    rank_parser.add_argument("--limit", "-n", type=int, help="Max results")
    rank_parser.add_argument("--sequential", action="store_true", help="Score jobs one at a time")
    rank_parser.add_argument("--json", action="store_true", help="Print JSON")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config(args.config)
    configure_logging(config, "DEBUG" if args.verbose else None)

    try:
        if args.command == "parse":
            cmd_parse(args, config)
        elif args.command == "score":
            cmd_score(args, config)
        elif args.command == "match":
            cmd_match(args, config)
        elif args.command == "rank":
            cmd_rank(args, config)
        elif args.command == "config":
            cmd_config(args, config)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"\nError: {e}")
        sys.exit(1)


def load_jobs(path: str, engine: ResumeEngine) -> list[JobPosting]:
    """Load postings from JSON, filling in required skills that ingestion left empty."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]

    jobs = []
    for item in data:
        job = JobPosting.from_dict(item)
        if not job.required_skills:
            job = replace(job, required_skills=engine.extract_job_skills(job.description))
        jobs.append(job)
    return jobs


def _load_resume(path: str, engine: ResumeEngine) -> StructuredResume:
    return engine.parser.parse_file(path)


def cmd_parse(args, config: Config):
    """Execute parse command."""
    engine = ResumeEngine.from_config(config)
    resume = _load_resume(args.resume, engine)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(resume.to_dict(), f, indent=2)
        print(f"💾 Saved structured resume to: {args.output}")
        return

    print(json.dumps(resume.to_dict(), indent=2))


def cmd_score(args, config: Config):
    """Execute score command."""
    engine = ResumeEngine.from_config(config)
    resume = _load_resume(args.resume, engine)
    outcome = engine.evaluate_resume(resume)
    breakdown = outcome.value

    if args.json:
        print(json.dumps(breakdown.to_dict(), indent=2))
        return

    print("\n📊 ATS Score\n")
    print("-" * 40)
    print(f"Skill Match:          {breakdown.skill_match:3}")
    print(f"Project Strength:     {breakdown.project_strength:3}")
    print(f"Experience Relevance: {breakdown.experience_relevance:3}")
    print(f"Resume Structure:     {breakdown.resume_structure:3}")
    print(f"Keyword Density:      {breakdown.keyword_density:3}")
    print(f"Action Verbs:         {breakdown.action_verbs:3}")
    print("-" * 40)
    print(f"Total:                {breakdown.total:3}")
    if outcome.degraded:
        print(f"\n⚠️  Scoring failed, showing fallback: {outcome.error}")


def cmd_match(args, config: Config):
    """Execute match command."""
    engine = ResumeEngine.from_config(config)
    resume = _load_resume(args.resume, engine)
    job = load_jobs(args.job, engine)[0]
    outcome = engine.evaluate_match(resume, job)
    match = outcome.value

    if args.json:
        print(json.dumps(match.to_dict(), indent=2))
        return

    print(f"\n🎯 {job.title}" + (f" @ {job.company}" if job.company else ""))
    _print_match(match)
    if outcome.degraded:
        print(f"\n⚠️  Matching failed, showing fallback: {outcome.error}")


def cmd_rank(args, config: Config):
    """Execute rank command."""
    if args.sequential:
        config.set("matching.parallel", False)
    engine = ResumeEngine.from_config(config)
    resume = _load_resume(args.resume, engine)
    jobs = load_jobs(args.jobs, engine)

    ranked = engine.rank_matches(resume, jobs, args.limit)

    if args.json:
        print(json.dumps([m.to_dict() for m in ranked], indent=2))
        return

    titles = {job.id: job for job in jobs}
    print(f"\n📊 Top {len(ranked)} of {len(jobs)} jobs:\n")
    print("-" * 80)

    for i, match in enumerate(ranked, 1):
        job = titles[match.job_id]
        print(f"\n{i}. {job.title}" + (f" @ {job.company}" if job.company else ""))
        _print_match(match)


def _print_match(match):
    breakdown = match.breakdown
    print(f"   📈 Match: {match.score}%")
    print(
        f"   Skills {breakdown.skill_match} | Keywords {breakdown.keyword_score} | "
        f"Experience {breakdown.experience_score} | Recency {breakdown.recency_score}"
    )
    if match.matched_skills:
        print(f"   ✅ Matched Skills: {', '.join(match.matched_skills)}")
    if match.missing_skills:
        print(f"   ❌ Missing Skills: {', '.join(match.missing_skills)}")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for complex values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()

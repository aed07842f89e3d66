"""
Job Board CLI - Command line interface for the job board.

Usage:
    python -m job_board [command] [options]

Commands:
    jobs          Browse active jobs with filters
    match         Compare your skills with a job's required skills
    apply         Apply to a job
    applications  List applications (job seeker or employer view)
    review        Change the status of an application
    post          Create or update a job posting
    manage        Close, reopen or delete a job posting
    profile       Show or edit a profile and its skills
    rate          Rate the job seeker behind an application
    ratings       Show a job seeker's ratings
    config        Manage configuration

Examples:
    python -m job_board jobs --search python --location berlin --salary-min 60000
    python -m job_board match --user <user-id> --job-id <job-id>
    python -m job_board profile --user <user-id> --add-skill "PostgreSQL"
    python -m job_board review --application-id <id> --status accepted
"""

import argparse
import json
import os
import sys
from typing import Optional

from job_board.board import JobBrowser, PostingManager, ProfileManager
from job_board.core import ApplicationStatus, FilterCriteria, JobStatus, UserRole
from job_board.core.matcher import additional_skills, compare_skills
from job_board.integrations import DataStoreError, create_store
from job_board.tracker import ApplicationTracker, RatingTracker, rating_label
from job_board.utils import Config, setup_logging


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Job Board - Browse, post and apply to jobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Jobs command
    jobs_parser = subparsers.add_parser("jobs", help="Browse active jobs")
    jobs_parser.add_argument("--search", "-s", default="", help="Search title, company, description, location")
    jobs_parser.add_argument("--location", "-l", default="", help="Location filter")
    jobs_parser.add_argument("--job-type", "-t", default="", help="Exact job type, e.g. Full-time")
    jobs_parser.add_argument("--salary-min", default="", help="Minimum salary")
    jobs_parser.add_argument("--salary-max", default="", help="Maximum salary")
    jobs_parser.add_argument("--user", "-u", help="Your user ID (shows skill match)")
    jobs_parser.add_argument("--output", "-o", help="Output file (JSON)")

    # Match command
    match_parser = subparsers.add_parser("match", help="Compare your skills with a job")
    match_parser.add_argument("--user", "-u", required=True, help="Your user ID")
    match_parser.add_argument("--job-id", "-j", required=True, help="Job ID")

    # Apply command
    apply_parser = subparsers.add_parser("apply", help="Apply to a job")
    apply_parser.add_argument("--user", "-u", required=True, help="Your user ID")
    apply_parser.add_argument("--job-id", "-j", required=True, help="Job ID")
    apply_parser.add_argument("--cover-letter", help="Cover letter text")

    # Applications command
    apps_parser = subparsers.add_parser("applications", help="List applications")
    apps_who = apps_parser.add_mutually_exclusive_group(required=True)
    apps_who.add_argument("--user", "-u", help="Job seeker user ID")
    apps_who.add_argument("--employer", "-e", help="Employer user ID")
    apps_parser.add_argument("--stats", action="store_true", help="Show status counts")
    apps_parser.add_argument("--export", help="Export to CSV file (bare names go to export.output_dir)")

    # Review command
    review_parser = subparsers.add_parser("review", help="Update an application's status")
    review_parser.add_argument("--application-id", "-a", required=True, help="Application ID")
    review_parser.add_argument("--status", "-s", required=True,
                               choices=[s.value for s in ApplicationStatus], help="New status")

    # Post command
    post_parser = subparsers.add_parser("post", help="Create or update a job posting")
    post_parser.add_argument("--employer", "-e", required=True, help="Employer user ID")
    post_parser.add_argument("--job-id", "-j", help="Existing job to update")
    post_parser.add_argument("--title", required=True, help="Job title")
    post_parser.add_argument("--company", required=True, help="Company name")
    post_parser.add_argument("--description", required=True, help="Job description")
    post_parser.add_argument("--location", help="Location")
    post_parser.add_argument("--job-type", help="Job type, e.g. Full-time")
    post_parser.add_argument("--salary-min", help="Minimum salary")
    post_parser.add_argument("--salary-max", help="Maximum salary")
    post_parser.add_argument("--requirements", help="Free text requirements")
    post_parser.add_argument("--skills", default="", help="Comma-separated required skills")

    # Manage command
    manage_parser = subparsers.add_parser("manage", help="Manage an employer's postings")
    manage_parser.add_argument("--employer", "-e", required=True, help="Employer user ID (owner of the postings)")
    manage_action = manage_parser.add_mutually_exclusive_group()
    manage_action.add_argument("--close", metavar="JOB_ID", help="Close a posting")
    manage_action.add_argument("--reopen", metavar="JOB_ID", help="Reopen a posting")
    manage_action.add_argument("--delete", metavar="JOB_ID", help="Delete a posting")

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="Show or edit a profile")
    profile_parser.add_argument("--user", "-u", required=True, help="User ID")
    profile_parser.add_argument("--create", action="store_true", help="Create the profile")
    profile_parser.add_argument("--email", help="Email (with --create)")
    profile_parser.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.JOB_SEEKER.value)
    profile_parser.add_argument("--name", help="Full name")
    profile_parser.add_argument("--company", help="Company name (employers)")
    profile_parser.add_argument("--location", help="Location")
    profile_parser.add_argument("--add-skill", help="Add a skill")
    profile_parser.add_argument("--remove-skill", help="Remove a skill")

    # Rate command
    rate_parser = subparsers.add_parser("rate", help="Rate an applicant")
    rate_parser.add_argument("--application-id", "-a", required=True, help="Application ID")
    rate_parser.add_argument("--employer", "-e", required=True, help="Employer user ID")
    rate_parser.add_argument("--stars", type=int, required=True, help="Rating from 1 to 5")
    rate_parser.add_argument("--review", default="", help="Optional review")

    # Ratings command
    ratings_parser = subparsers.add_parser("ratings", help="Show a job seeker's ratings")
    ratings_parser.add_argument("--user", "-u", required=True, help="Job seeker user ID")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--set-api-key", nargs=2, metavar=("PROVIDER", "KEY"), help="Set API key")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Load configuration
    config = Config(args.config)
    setup_logging("DEBUG" if args.verbose else config.get_log_level())

    commands = {
        "jobs": cmd_jobs,
        "match": cmd_match,
        "apply": cmd_apply,
        "applications": cmd_applications,
        "review": cmd_review,
        "post": cmd_post,
        "manage": cmd_manage,
        "profile": cmd_profile,
        "rate": cmd_rate,
        "ratings": cmd_ratings,
        "config": cmd_config,
    }

    # Execute command
    try:
        commands[args.command](args, config)

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except DataStoreError as e:
        print(f"\nData store error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def cmd_jobs(args, config: Config):
    """Execute jobs command."""
    store = create_store(config)
    criteria = FilterCriteria.from_form(
        search=args.search,
        location=args.location,
        job_type=args.job_type,
        salary_min=args.salary_min,
        salary_max=args.salary_max,
    )

    result = JobBrowser(store).browse(criteria, user_id=args.user)

    print(f"\nShowing {result.shown_count} of {result.total_count} jobs\n")

    for i, listing in enumerate(result.listings, 1):
        job = listing.job
        details = [part for part in (job.company_name, job.location, job.job_type, job.salary_display) if part]

        print(f"{i:2}. {job.title}")
        print(f"    {' | '.join(details)}")
        if job.required_skills:
            print(f"    Skills: {', '.join(job.required_skills)}")
        if listing.apply_state:
            if listing.comparison.matching:
                print(f"    ✅ You have {len(listing.comparison.matching)} required skill(s)")
            if listing.comparison.missing:
                print(f"    ❌ Missing {len(listing.comparison.missing)} required skill(s): "
                      f"{', '.join(listing.comparison.missing)}")
            print(f"    [{listing.apply_label}]")
        print(f"    ID: {job.id}")
        print()

    if result.empty_message:
        print(result.empty_message)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump([listing.to_dict() for listing in result.listings], f, indent=2, default=str)
        print(f"💾 Saved {result.shown_count} jobs to {args.output}")


def cmd_match(args, config: Config):
    """Execute match command."""
    store = create_store(config)

    profile = ProfileManager(store).get_profile(args.user)
    if not profile:
        print(f"Error: Profile {args.user} not found")
        return

    job = PostingManager(store).get_job(args.job_id)
    if not job:
        print(f"Error: Job {args.job_id} not found")
        return

    comparison = compare_skills(profile.skills, job.required_skills)

    print(f"\n🎯 {job.title} @ {job.company_name}")
    print(f"   Required: {', '.join(job.required_skills) or '(none)'}")
    print(f"   ✅ Matching: {', '.join(comparison.matching) or '(none)'}")
    print(f"   ❌ Missing: {', '.join(comparison.missing) or '(none)'}")
    extra = additional_skills(profile.skills, comparison.matching)
    if extra:
        print(f"   ➕ Additional: {', '.join(extra)}")
    print(f"\n   {'You can apply to this job.' if comparison.can_apply else 'You need all required skills to apply.'}")


def cmd_apply(args, config: Config):
    """Execute apply command."""
    tracker = ApplicationTracker(create_store(config))
    success, message = tracker.apply_to_job(args.job_id, args.user, cover_letter=args.cover_letter)
    print(f"\n{'✅' if success else '❌'} {message}")


def cmd_applications(args, config: Config):
    """Execute applications command."""
    tracker = ApplicationTracker(create_store(config))

    if args.stats:
        if args.employer:
            reviews = tracker.get_applications_for_employer(args.employer)
            stats = {"total": len(reviews)}
            for status in ApplicationStatus:
                stats[status.value] = len([r for r in reviews if r.application.status == status])
        else:
            stats = tracker.get_statistics(args.user)

        print("\n📊 Application Statistics")
        print("=" * 40)
        print(f"Total Applications: {stats['total']}")
        for status in ApplicationStatus:
            print(f"  {status.value.title()}: {stats[status.value]}")
        return

    if args.employer:
        reviews = tracker.get_applications_for_employer(args.employer)
        print(f"\n📋 Applications ({len(reviews)} total)\n")
        print("-" * 80)

        for review in reviews:
            app = review.application
            name = review.applicant.display_name if review.applicant else app.applicant_id
            print(f"\n{name} - {review.job.title}")
            print(f"   Status: {app.status.value.title()} | Applied: {app.applied_at[:10]}")
            if review.comparison.matching:
                print(f"   Matching Skills ({len(review.comparison.matching)}): {', '.join(review.comparison.matching)}")
            if review.additional_skills:
                print(f"   Additional Skills: {', '.join(review.additional_skills)}")
            if review.comparison.missing:
                print(f"   Missing Required Skills ({len(review.comparison.missing)}): "
                      f"{', '.join(review.comparison.missing)}")
            print(f"   ID: {app.id}")

        applications = [r.application for r in reviews]
    else:
        applications = tracker.get_applications_for_seeker(args.user)
        postings = PostingManager(tracker.store)
        print(f"\n📋 Applications ({len(applications)} total)\n")
        print("-" * 80)

        for app in applications:
            job = postings.get_job(app.job_id)
            title = f"{job.title} @ {job.company_name}" if job else app.job_id
            print(f"\n{title}")
            print(f"   Status: {app.status.value.title()} | Applied: {app.applied_at[:10]}")
            print(f"   ID: {app.id}")

    if args.export:
        filepath = args.export
        # Bare file names go to the configured export directory
        if not os.path.dirname(filepath):
            filepath = os.path.join(config.get_output_dir(), filepath)
        path = tracker.export_to_csv(applications, filepath)
        print(f"\n✅ Exported to {path}")


def cmd_review(args, config: Config):
    """Execute review command."""
    tracker = ApplicationTracker(create_store(config))
    app = tracker.update_status(args.application_id, ApplicationStatus(args.status))
    if app:
        print(f"✅ Application status updated to {app.status.value}.")
    else:
        print(f"❌ Application {args.application_id} not found")


def cmd_post(args, config: Config):
    """Execute post command."""
    postings = PostingManager(create_store(config))
    form = {
        "title": args.title,
        "company_name": args.company,
        "description": args.description,
        "location": args.location,
        "job_type": args.job_type,
        "salary_min": args.salary_min,
        "salary_max": args.salary_max,
        "requirements": args.requirements,
        "required_skills": [s.strip() for s in args.skills.split(",") if s.strip()],
    }

    job, message = postings.save_job(args.employer, form, job_id=args.job_id)
    print(f"\n{'✅' if job else '❌'} {message}")
    if job:
        print(f"   ID: {job.id}")


def cmd_manage(args, config: Config):
    """Execute manage command."""
    postings = PostingManager(create_store(config))

    if args.close or args.reopen:
        job_id = args.close or args.reopen
        status = JobStatus.CLOSED if args.close else JobStatus.ACTIVE
        job, message = postings.set_status(job_id, status, args.employer)
        print(f"{'✅' if job else '❌'} {message}")

    elif args.delete:
        success, message = postings.delete_job(args.delete, args.employer)
        print(f"{'✅' if success else '❌'} {message}")

    else:
        jobs = postings.list_employer_jobs(args.employer)
        print(f"\n📋 Your Job Postings ({len(jobs)})\n")
        for job in jobs:
            print(f"  [{job.status.value}] {job.title} - {job.company_name}")
            print(f"     Required Skills ({len(job.required_skills)}): {', '.join(job.required_skills)}")
            print(f"     ID: {job.id}")


def cmd_profile(args, config: Config):
    """Execute profile command."""
    profiles = ProfileManager(create_store(config))

    if args.create:
        if not args.email:
            print("Error: --email is required with --create")
            return
        profile = profiles.create_profile(
            user_id=args.user,
            email=args.email,
            role=UserRole(args.role),
            full_name=args.name,
            company_name=args.company,
        )
        print(f"✅ Created profile for {profile.email}")
        return

    if args.add_skill or args.remove_skill:
        if args.add_skill:
            success, message = profiles.add_skill(args.user, args.add_skill)
        else:
            success, message = profiles.remove_skill(args.user, args.remove_skill)
        print(f"{'✅' if success else '❌'} {message}")
        return

    changes = {}
    if args.name is not None:
        changes["full_name"] = args.name
    if args.company is not None:
        changes["company_name"] = args.company
    if args.location is not None:
        changes["location"] = args.location
    if changes:
        profile = profiles.update_profile(args.user, **changes)
        if not profile:
            print(f"❌ Profile {args.user} not found")
            return
        print("✅ Profile updated.")

    profile = profiles.get_profile(args.user)
    if not profile:
        print(f"❌ Profile {args.user} not found")
        return

    print("\n📋 Profile\n")
    print(f"Name: {profile.full_name or '-'}")
    print(f"Email: {profile.email}")
    print(f"Role: {profile.role.value}")
    if profile.company_name:
        print(f"Company: {profile.company_name}")
    if profile.location:
        print(f"Location: {profile.location}")
    print(f"\nSkills ({len(profile.skills)}):")
    for skill in profile.skills:
        print(f"  - {skill}")


def cmd_rate(args, config: Config):
    """Execute rate command."""
    ratings = RatingTracker(create_store(config))
    success, message = ratings.submit_rating(
        args.application_id,
        args.employer,
        args.stars,
        review=args.review,
    )
    print(f"{'✅' if success else '❌'} {message}")


def cmd_ratings(args, config: Config):
    """Execute ratings command."""
    ratings = RatingTracker(create_store(config))
    summary = ratings.get_summary(args.user)

    if not summary:
        print("No ratings yet")
        return

    print(f"\n{'★' * summary.stars}{'☆' * (5 - summary.stars)} {summary.average} ({summary.review_label})\n")
    for rating in ratings.get_ratings(args.user):
        print(f"  {rating.rating}/5 {rating_label(rating.rating)}" + (f": {rating.review}" if rating.review else ""))


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

    elif args.set_api_key:
        provider, key = args.set_api_key
        config.set_api_key(provider, key)
        print(f"✅ Set API key for {provider}")

    else:
        print("Use --show, --set, --set-api-key, or --init")


if __name__ == "__main__":
    main()

import click
from hotel_cms.extensions import db


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (development; use `flask db upgrade` in production)."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("seed-sections")
    def seed_sections():
        """Create the fixed hero sections of every page."""
        from hotel_cms.application.cms.sections import seed_static_sections

        created = seed_static_sections()
        click.echo(f"{created} section(s) created.")

    @app.cli.command("create-admin")
    @click.argument("username")
    @click.password_option()
    @click.option("--email", default=None)
    def create_admin(username, password, email):
        """Create a back-office administrator."""
        from hotel_cms.models.admin import Admin

        if Admin.query.filter_by(username=username).first():
            raise click.ClickException(f"Admin '{username}' already exists.")

        admin = Admin()
        admin.username = username
        admin.email = email
        admin.set_password(password)

        db.session.add(admin)
        db.session.commit()
        click.echo(f"Admin '{username}' created.")

    @app.cli.command("check-sections")
    def check_sections():
        """Verify ordering, image rules and block limits of every section."""
        from hotel_cms.domain.exceptions import InvariantViolation
        from hotel_cms.domain.invariants.section import assert_section
        from hotel_cms.models.section import Section

        problems = 0
        for section in Section.query.order_by(Section.page, Section.position).all():
            try:
                assert_section(section)
            except InvariantViolation as e:
                problems += 1
                click.echo(f"{section.code}: {e.message}", err=True)

        if problems:
            raise click.ClickException(f"{problems} section(s) failed the check.")
        click.echo("All sections are consistent.")

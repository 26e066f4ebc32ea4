from hotel_cms.application.cms.blocks import BlockFields, create_block
from hotel_cms.extensions import db
from hotel_cms.models.admin import Admin
from hotel_cms.models.content_block import ContentBlock
from hotel_cms.models.section import Section


def test_seed_sections_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-sections"])
    assert result.exit_code == 0
    assert "4 section(s) created." in result.output

    result = runner.invoke(args=["seed-sections"])
    assert "0 section(s) created." in result.output
    assert Section.query.count() == 4


def test_create_admin_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(
        args=["create-admin", "accueil", "--email", "accueil@example.com"],
        input="s3cret\ns3cret\n",
    )

    assert result.exit_code == 0
    admin = Admin.query.filter_by(username="accueil").one()
    assert admin.check_password("s3cret")
    assert admin.email == "accueil@example.com"

    result = runner.invoke(args=["create-admin", "accueil", "--password", "other"])
    assert result.exit_code != 0
    assert "already exists" in result.output


def test_check_sections_reports_broken_ordering(app, make_section, make_image):
    section = make_section(image_mode="required")
    create_block(section_code=section.code, fields=BlockFields(), image=make_image())
    runner = app.test_cli_runner()

    result = runner.invoke(args=["check-sections"])
    assert result.exit_code == 0
    assert "consistent" in result.output

    ContentBlock.query.first().position = 5
    db.session.commit()

    result = runner.invoke(args=["check-sections"])
    assert result.exit_code != 0
    assert section.code in result.output


def test_check_sections_reports_unknown_image_mode(app, make_section):
    section = make_section(image_mode="sometimes")

    result = app.test_cli_runner().invoke(args=["check-sections"])

    assert result.exit_code != 0
    assert f"{section.code}: Section '{section.code}' has an unknown image mode" in result.output

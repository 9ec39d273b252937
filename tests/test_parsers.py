"""Tests for resume and JD parsers."""

import pytest

from ats_checker.parsers.jd_parser import SAMPLE_JD, load_jd_file, parse_jd
from ats_checker.parsers.resume_parser import parse_resume, save_extracted_text


class TestJDParser:
    def test_parse_jd_normalizes(self):
        result = parse_jd("  Senior Engineer  \n\n\n\nPython, AWS \t\n")
        assert result == "Senior Engineer\n\nPython, AWS"

    def test_load_jd_file(self, tmp_path):
        jd_file = tmp_path / "jd.txt"
        jd_file.write_text("Backend Engineer\n\n\n\nRequirements: Python", encoding="utf-8")
        result = load_jd_file(jd_file)
        assert result == "Backend Engineer\n\nRequirements: Python"

    def test_load_missing_jd(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_jd_file(tmp_path / "missing.txt")

    def test_sample_jd(self):
        assert "Front-End Developer" in SAMPLE_JD
        assert "TypeScript" in SAMPLE_JD


class TestResumeParser:
    def test_parse_txt_file(self, tmp_path):
        txt_file = tmp_path / "resume.txt"
        txt_file.write_text("Jane Doe  \n\n\n\nExperience: ...", encoding="utf-8")
        assert parse_resume(txt_file) == "Jane Doe\n\nExperience: ..."

    def test_parse_md_file(self, tmp_path):
        md_file = tmp_path / "resume.md"
        md_file.write_text("# Jane Doe\n## Skills", encoding="utf-8")
        assert "## Skills" in parse_resume(str(md_file))

    def test_parse_docx_file(self, tmp_path):
        from docx import Document

        doc = Document()
        doc.add_paragraph("Jane Doe")
        doc.add_paragraph("Skills: Python, SQL")
        path = tmp_path / "Jane_Doe.docx"
        doc.save(str(path))

        result = parse_resume(path)
        assert "Jane Doe" in result
        assert "Skills: Python, SQL" in result

    def test_parse_pdf_file(self, tmp_path):
        import fitz

        doc = fitz.open()
        page = doc.new_page()
        page.insert_text((72, 72), "Jane Doe Experience Python")
        path = tmp_path / "resume.pdf"
        doc.save(str(path))
        doc.close()

        assert "Jane Doe Experience Python" in parse_resume(path)

    def test_unsupported_format(self, tmp_path):
        bad_file = tmp_path / "resume.xyz"
        bad_file.write_text("test")
        with pytest.raises(ValueError, match="Unsupported file type"):
            parse_resume(bad_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_resume(tmp_path / "missing.pdf")


class TestSaveExtractedText:
    def test_writes_file(self, tmp_path):
        path = save_extracted_text("Jane Doe", tmp_path / "out" / "resume_extracted.txt")
        assert path.read_text(encoding="utf-8") == "Jane Doe"

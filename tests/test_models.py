# test_models.py
#
# Tests:
# - Notice.lines: error block carries the flag line
# - Notice.lines: warning block omits the flag line
# - Notice.render: trailing newline, blank first and last lines
# - Notice.render: multi-line messages are kept as given
# - Notice: negative flags are printed literally

import pytest

from error_state.models import Notice, NoticeKind


class TestNoticeLines:
    def test_error_lines(self):
        notice = Notice(NoticeKind.ERROR, "integrate", "step size too small", 12)
        assert notice.lines() == [
            "",
            "***** ERROR *****",
            "Function: integrate",
            "Error Flag: 12",
            "Message:",
            "step size too small",
            "",
        ]

    def test_warning_lines(self):
        notice = Notice(NoticeKind.WARNING, "integrate", "step size reduced", 12)
        assert notice.lines() == [
            "",
            "***** WARNING *****",
            "Function: integrate",
            "Message:",
            "step size reduced",
            "",
        ]

    @pytest.mark.parametrize("flag", [0, -1, 1000])
    def test_flag_printed_literally(self, flag):
        notice = Notice(NoticeKind.ERROR, "f", "m", flag)
        assert f"Error Flag: {flag}" in notice.lines()


class TestNoticeRender:
    def test_render_error(self):
        notice = Notice(NoticeKind.ERROR, "f", "m", 1)
        assert notice.render() == "\n***** ERROR *****\nFunction: f\nError Flag: 1\nMessage:\nm\n\n"

    def test_multiline_message_kept(self):
        notice = Notice(NoticeKind.WARNING, "f", "line one\nline two", 1)
        assert "Message:\nline one\nline two\n\n" in notice.render()

    def test_notice_is_frozen(self):
        notice = Notice(NoticeKind.ERROR, "f", "m", 1)
        with pytest.raises(AttributeError):
            notice.flag = 2

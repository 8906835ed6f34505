import json

from apps.notice.projector import NoticeProjector
from apps.notice.protocol import InitialState, NoticeAdded, NoticeDeleted


def make_notice(notice_id, title=None):
    return {
        "id": notice_id,
        "title": title or f"Notice {notice_id}",
        "content": "content",
        "category": "General",
        "priority": "Low",
        "author": "Office",
        "createdAt": "2026-10-19T09:00:00Z",
    }


class TestNoticeProjector:
    def test_initial_state_replaces_everything(self):
        projector = NoticeProjector()
        projector.apply({"type": "NOTICE_ADDED", "notice": make_notice(9)})
        projector.apply({"type": "INITIAL_STATE", "notices": [make_notice(2), make_notice(1)]})
        assert [n["id"] for n in projector.notices] == [2, 1]

    def test_added_is_prepended(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(1)]))
        projector.apply(NoticeAdded(make_notice(2)))
        assert [n["id"] for n in projector.notices] == [2, 1]

    def test_deleted_removes_matching_id(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(3), make_notice(2), make_notice(1)]))
        projector.apply(NoticeDeleted(2))
        assert [n["id"] for n in projector.notices] == [3, 1]
        assert projector.get(2) is None
        assert projector.get(3)["title"] == "Notice 3"

    def test_deleting_absent_id_is_a_no_op(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(1)]))
        projector.apply(NoticeDeleted(99))
        projector.apply(NoticeDeleted(99))
        assert [n["id"] for n in projector.notices] == [1]

    def test_initial_state_input_is_not_aliased(self):
        notices = [make_notice(1)]
        projector = NoticeProjector()
        projector.apply({"type": "INITIAL_STATE", "notices": notices})
        projector.apply(NoticeAdded(make_notice(2)))
        assert len(notices) == 1

    def test_rejection_is_recorded_without_touching_notices(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(1)]))
        projector.apply({"type": "COMMAND_REJECTED", "requestId": "r1", "reason": "validation", "errors": {}})
        assert [n["id"] for n in projector.notices] == [1]
        assert projector.rejections[0]["requestId"] == "r1"

    def test_unknown_fact_is_ignored(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(1)]))
        projector.apply({"type": "NOTICE_EDITED", "id": 1})
        assert [n["id"] for n in projector.notices] == [1]

    def test_commands_do_not_mutate_local_state(self):
        projector = NoticeProjector()
        projector.apply(InitialState([make_notice(1)]))

        add = projector.add_notice({"title": "t", "content": "c", "category": "Event", "priority": "Low", "author": "a"})
        delete = projector.delete_notice(1)

        assert add["type"] == "ADD_NOTICE"
        assert add["notice"]["category"] == "Event"
        assert delete == {"type": "DELETE_NOTICE", "id": 1, "requestId": delete["requestId"]}
        assert add["requestId"] != delete["requestId"]
        assert [n["id"] for n in projector.notices] == [1]

    def test_encode_produces_json_text(self):
        command = NoticeProjector().delete_notice(5)
        assert json.loads(NoticeProjector.encode(command)) == command

    def test_commands_are_handed_to_send(self):
        sent = []
        projector = NoticeProjector(send=sent.append)
        projector.apply(InitialState([make_notice(1)]))

        delete = projector.delete_notice(1)

        assert [json.loads(text) for text in sent] == [delete]
        assert [n["id"] for n in projector.notices] == [1]

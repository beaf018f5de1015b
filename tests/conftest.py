"""
Shared fixtures for building workbooks in memory.
"""

import io

import openpyxl
import pytest


def workbook_bytes(rows, title="Strings"):
    """Build an .xlsx file from a list of rows and return its bytes."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = title
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def read_output_rows(data):
    """Read the Sheet1 rows of an output workbook."""
    wb = openpyxl.load_workbook(io.BytesIO(data))
    assert wb.sheetnames == ["Sheet1"]
    rows = [list(row) for row in wb["Sheet1"].iter_rows(values_only=True)]
    wb.close()
    return rows


@pytest.fixture
def dialogue_rows():
    """Dialogue table with EN and JA complete and CT missing its (F) column."""
    header = [
        'ID', 'Speaker', 'Type', 'Scene', 'Order', 'Note', 'KR', 'Comment',
        'EN (M)', 'EN (F)', 'JA (M)', 'JA (F)', 'CT (M)', 'Memo'
    ]
    return [
        header,
        ['D001', 'Elder', 'Talk', 'S1', 1, '', '안녕', 'greeting',
         'Hello', 'Hello', 'こんにちは', 'こんにちは', '你好', 'm1'],
        ['D002', 'Guard', 'Talk', 'S1', 2, 'loud', '멈춰', '',
         'Halt', 'Halt!', '止まれ', '止まって', '站住', 'm2'],
        ['D003', 'Elder', 'Talk', 'S2', 3, '', '잘가', 'farewell',
         'Farewell', 'Goodbye', 'さらば', 'さようなら', '再见', 'm3'],
    ]


@pytest.fixture
def master_rows():
    """String master table with all seven language columns."""
    header = [
        'ID', 'Key', 'Group', 'Type', 'Max', 'Note', 'KR',
        'EN', 'CT', 'CS', 'JA', 'TH', 'ES-LATAM', 'Category', 'Updated', 'PT-BR'
    ]
    return [
        header,
        [42, 'UI_OK', 'UI', 'Button', 10, '', '확인',
         'OK', '確定', '确定', 'OK', 'ตกลง', 'Aceptar', 'common', '2024-01-02', 'OK'],
        [43, 'UI_CANCEL', 'UI', 'Button', 10, '', '취소',
         'Cancel', '取消', '取消', 'キャンセル', 'ยกเลิก', 'Cancelar', 'common', '2024-01-02', 'Cancelar'],
    ]


@pytest.fixture
def dialogue_bytes(dialogue_rows):
    return workbook_bytes(dialogue_rows)


@pytest.fixture
def master_bytes(master_rows):
    return workbook_bytes(master_rows)

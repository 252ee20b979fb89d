"""Shared report fixtures."""

import pytest

from mf_ftp.core.base import NoDataFoundError


DATASET_LIST = [
    "Volume Unit    Referred Ext Used Recfm Lrecl BlkSz Dsorg Dsname",
    "F1DBAR 3390   2016/12/19  3   19  FB      80  3120  PO  CB12V51.CNTL",
    "F1SYS1 3390   2015/11/09  1   13  FB      80 32720  PO  CB12V51.DBRMLIB",
    "F1DBAR 3390   2016/12/19  1    2  FB      80  3120  PO  CB12V51.EXEC",
    "F1SYS1 3390   2016/12/19  1   75  U     6144  6144  PO  CB12V51.LOAD",
    "F1SYS1 3390   2015/11/09  1   75  U     6144  6144  PO  CB12V51.LOAD0",
    "F1SYS1 3390   **NONE**    1  300  VB   27994 27998  PS  CB12V51.LOG",
    "F1DBAR 3390   2015/11/09  1   13  FB      80 32720  PO  CB12V51.MAPCOPY",
    "F1DBAR 3390   **NONE**    1   13  FB      80 32720  PO  CB12V51.MSGTXT",
    "F1DBAR 3390   2015/11/09  1   33  FB      80  3120  PO  CB12V51.SOURCE",
    "F1DBAR 3390   2015/11/09  1   68  FB      80  3120  PO  CB12V51.WSIM",
    "F1DBAR 3390   2016/01/25  7    7  FB      80  3120  PS  CNTL.XMIT",
    "                                                   VSAM DDIR",
    "F1SYS1 3390                                        VSAM DDIR.D",
    "F1SYS1 3390                                        VSAM DDIR.I",
    "F1DBAR 3390   2015/11/09  1    1  FB      80  3120  PS  EXEC.XMIT",
    "F1SYS1 3390   **NONE**    1    1  FB     133  1330  PS  HCD.MSGLOG",
    "F1SYS1 3390   **NONE**    1    1  FB      80  1600  PS  HCD.TERM",
    "F1SYS1 3390   **NONE**    1    3  FB      80  6160  PS  HCD.TRACE",
    "F1SYS1 3390   2017/02/27  2   12  FB      80  3120  PO  ISPF.ISPPROF",
    "F1SYS1 3390   2017/02/27  1    1  VB     256  6233  PS  DELETE.ME",
    "F1DBAR 3390   2015/11/09  1    1  FB      80  3120  PS  KSDSCUST",
    "F1SYS1 3390   2015/12/17  1    1  FB      80  3120  PS  KSDSPOLY",
    "F1SYS1 3390   2016/12/19  1   14  FB      80  3120  PO  MOUNT",
    "F1DBAR 3390   2016/01/17  1   85  FB      80  3120  PS  PATCH",
    "F1DBAR 3390   2016/01/18  1   40  FB      80  3120  PO  RMFZV2R1.ISPTABLE",
    "F1DBAR 3390   2017/02/27  1  795  FB      80  6160  PO  SMF.CNTL",
    "F1SYS1 3390   2017/02/27  1    1  FB      80   800  PS  SMFR113A",
    "F1SYS1 3390   2017/02/24  1   15  U    27998 27998  PS  SMF0224.DUMP",
    "F1SYS1 3390   2017/02/24  1   75  FB    1024 27648  PS  SMF0224.DUMP.TERSE",
    "F1SYS1 3390   2017/02/23  5    5  VB     256  6233  PS  SMF1",
    "F1SYS1 3390   2016/01/17  1    1  FB      80  3120  PS  SMPAPPLY",
    "F1DBAR 3390   2016/01/21  1    1  FB      80  3120  PS  SMPRECVR",
    "F1SYS1 3390   2016/01/21  1    1  FB      80  3120  PS  SMPUCLN",
    "F1SYS1 3390   2015/11/09  1   22  FB      80  3120  PS  SOURCE.XMIT",
    "F1SYS1 3390   2015/11/30  3   23  FB     132 27984  PS  SRCHDSL.LIST",
    "F1SYS1 3390   2017/02/19  1    1  FBA     80  3120  PS  SYSCMD",
    "F1SYS1 3390   2017/02/19  1    1  FBA     80  3120  PS  SYSCMD2",
    "F1SYS1 3390   2017/02/19  1    1  FBA     80  3120  PS  SYSCMD3",
    "F1SYS1 3390   2017/02/19  1    1  FB      80 27920  PS  S0W1.ISPVCALL.TRACE",
    "F1SYS1 3390   2015/12/14  1    9  VA     125   129  PS  S0W1.SPFLOG1.LIST",
    "F1SYS1 3390   2017/02/27  1    9  VA     125   129  PS  S0W1.SPFLOG2.LIST",
    "F1SYS1 3390   2017/02/24  1    1  FB      80   800  PS  S0W1.SPFTEMP0.CNTL",
    "F1DBAR 3390   2017/02/24  1  750  VB     100 32756  PO  TEST.JCL",
    "F1DBAR 3390   2015/11/09  1   49  FB      80  3120  PS  WSIM.XMIT",
    "Migrated                                                CPPOBJS.OBJ",
    "250 List completed successfully.",
]

UNPADDED_DATASET_LIST = [
    "Volume Unit    Referred Ext Used Recfm Lrecl BlkSz Dsorg Dsname",
    "XRFS79 3390   2017/08/04  1 4080  FB    1024 27648  PS  'USERHLQI.T1.HISPAXZ'",
    "XRFS95 3390   2017/08/04  313875  FB    1024 27648  PS  'USERHLQI.T2.HISPAXZ'",
    "XRFS61 3390   2017/08/04  1 4500  FB    1024 27648  PS  'USERHLQI.T3.HISPAXZ'",
    "XRFS67 3390   2017/08/04  314760  FB    1024 27648  PS  'USERHLQI.T4.HISPAXZ'",
]

MEMBER_LIST = [
    " Name     VV.MM   Created       Changed      Size  Init   Mod   Id",
    "JVBR30    01.01 2018/09/07 2018/09/07 03:52    13    13     0 USER",
    "JVBR42    01.01 2018/09/07 2018/09/07 07:41    13    13     0 USER",
]

LOADLIB_MEMBER_LIST = [
    " Name      Size     TTR   Alias-of AC --------- Attributes --------- Amode Rmode ",
    "DD        03DBD8   031506 IRRENV00 01 FO             RN RU            31    24   ",
    "DMOCI001  000710   03370C          00 FO                              31    ANY  ",
]

USS_LIST = [
    "total 554",
    "lrwxrwxrwx   1 CLASGEN  GRP2611        9 Jul 13 19:13 $SYSNAME -> $SYSNAME/",
    "drwxr-xr-x   2 CEC3     GRP2611     8192 Oct 10  2017 CEC3",
    "-rwx------   1 USER     GRP2611     1749 Aug 25  2004 DetailMerge",
    "-rw-r--r--   1 USER     GRP2611      120 Mar  3 09:48 my notes.txt",
]

JOB_LIST = [
    "JOBNAME  JOBID    OWNER    STATUS CLASS",
    "HISCONVT JOB17459 MIAOCX   OUTPUT A        RC=0000 6 spool files",
    "HISCONVT JOB17462 MIAOCX   ACTIVE A",
    "EZA2284I JOB00083 USER1    OUTPUT A ABEND=806 3 spool files",
    "EZA2284I JOB00082 USER1    OUTPUT A (JCL error) 3 spool files",
    "EZA2284I JOB00093 USER1    INPUT  A -HELD-",
    "HISCONVT JOB17463 MIAOCX   held",
]

JOB_STATUS_RC0 = [
    "JOBNAME  JOBID    OWNER    STATUS CLASS",
    "UTHELLO JOB12345  USER     OUTPUT A        RC=0000",
    "--------",
    "         ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT ",
    "         001 JES2              K JESMSGLG      1206 ",
    "         002 JES2              K JESJCL        3134 ",
    "         003 JES2              K JESYSMSG      2480 ",
    "         004 JAVA     JAVAJVM  K SYSOUT         801 ",
    "         005 JAVA     JAVAJVM  K STDOUT       22258 ",
    "5 spool files ",
]

JOB_STATUS_ABEND = [
    "JOBNAME  JOBID    OWNER    STATUS CLASS",
    "HELLO    TSU18242 USER     OUTPUT TSU      ABEND=622 ",
    "--------",
    "         ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT  ",
    "         001 PROC01   PROC01   B SYS00010       192 ",
    "1 spool files ",
]

JOB_STATUS_JCL_ERROR = [
    "JOBNAME  JOBID    OWNER    STATUS CLASS",
    "HELLO    JOB00256 USER     OUTPUT A        (JCL error) ",
    "--------",
    "         ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT  ",
    "         001 JES2        N/A   A JESMSGLG      1590 ",
    "         002 JES2        N/A   A JESJCL         627 ",
    "         003 JES2        N/A   A JESYSMSG      1188 ",
    "3 spool files ",
]

JOB_STATUS_NO_RC = [
    "JOBNAME  JOBID    OWNER    STATUS CLASS",
    "TESTJOB1 JOB07186 USER001  OUTPUT A",
    "--------",
    "         ID  STEPNAME PROCSTEP C DDNAME   BYTE-COUNT ",
    "         001 JES2        N/A   H JESMSGLG      1582 ",
    "         002 JES2        N/A   H JESJCL         324 ",
    "2 spool files ",
]

JESMSGLG_RC8 = "\n".join([
    "1                     J E S 2  J O B  L O G  --  S Y S T E M  C E C 3  --  N O D E  X R F M C L          ",
    "0 ",
    "02.07.44 JOB07186 ---- FRIDAY,    12 JUL 2019 ----",
    "02.07.44 JOB07186  IRR010I  USERID USER001  IS ASSIGNED TO THIS JOB.",
    "02.07.44 JOB07186  $HASP373 TESTJOB1 STARTED - INIT 10   - CLASS A        - SYS CEC3",
    "02.07.44 JOB07186  IEF403I TESTJOB1 - STARTED - TIME=02.07.44",
    "02.07.55 JOB07186  IEF404I TESTJOB1 - ENDED - TIME=02.07.55",
    "02.07.55 JOB07186  $HASP395 TESTJOB1 ENDED - RC=0008",
    "0------ JES2 JOB STATISTICS ------",
    "-  12 JUL 2019 JOB EXECUTION DATE",
])

JESMSGLG_ABEND = "\n".join([
    "21.55.49 JOB18527 ---- THURSDAY,  06 AUG 2020 ----",
    "21.55.49 JOB18527  $HASP373 SLEEP    STARTED - INIT 1    - CLASS A        - SYS P21",
    "21.55.57 JOB18527  IEF450I SLEEP SLEEP - ABEND=S222 U0000 REASON=00000000  162",
    "21.55.57 JOB18527  -SLEEP    ENDED.  NAME-                     TOTAL CPU TIME=   .00  TOTAL ELAPSED TIME=    .1",
    "21.55.57 JOB18527  $HASP395 SLEEP    ENDED - ABEND=S222",
    "0------ JES2 JOB STATISTICS ------",
])

JESMSGLG_SECURITY = "\n".join([
    "01.31.28 JOB18539 ---- FRIDAY,    07 AUG 2020 ----",
    "01.31.28 JOB18539  ICH408I USER(XIXUE   ) GROUP(TESTER  ) NAME(XI XUE BJ JIA       )",
    "                     SUBMITTER(TNZSYS  )",
    "                   LOGON/JOB INITIATION - SUBMITTER IS NOT AUTHORIZED BY USER",
    "-$HASP106 JOB DELETED BY JES2 OR CANCELLED BY OPERATOR BEFORE EXECUTION",
    "0         0.00 MINUTES EXECUTION TIME",
])

SUBMIT_REPLY = "250-It is known to JES as JOB12345\r\n250 Transfer completed successfully."


class FakeTransport:
    """
    In-memory FtpTransport.

    Replies are looked up by the exact path passed to list()/retrieve();
    a path mapped to None raises NoDataFoundError. Every call is recorded;
    stored data is kept by remote name.
    """

    def __init__(self, listings=None, files=None, submit_reply=SUBMIT_REPLY):
        self.listings = listings or {}
        self.files = files or {}
        self.submit_reply = submit_reply
        self.stored = {}
        self.calls = []

    def site(self, directives):
        self.calls.append(("site", directives))
        return "200 SITE command was accepted"

    def list(self, path):
        self.calls.append(("list", path))
        reply = self.listings[path]
        if reply is None:
            raise NoDataFoundError(f"No data sets found for {path}")
        return list(reply)

    def retrieve(self, path):
        self.calls.append(("retrieve", path))
        return self.files[path]

    def store(self, path, data):
        self.calls.append(("store", path))
        self.stored[path] = data
        return self.submit_reply

    def delete(self, path):
        self.calls.append(("delete", path))
        return f"250 Cancel successful for {path}"

    def sites(self):
        return [args for name, args in self.calls if name == "site"]


@pytest.fixture
def dataset_list():
    return list(DATASET_LIST)


@pytest.fixture
def unpadded_dataset_list():
    return list(UNPADDED_DATASET_LIST)


@pytest.fixture
def member_list():
    return list(MEMBER_LIST)


@pytest.fixture
def loadlib_member_list():
    return list(LOADLIB_MEMBER_LIST)


@pytest.fixture
def uss_list():
    return list(USS_LIST)


@pytest.fixture
def job_list():
    return list(JOB_LIST)


@pytest.fixture
def write_report(tmp_path):
    """Write lines to a file under tmp_path and return its path."""
    def _write(name, lines):
        path = tmp_path / name
        text = lines if isinstance(lines, str) else "\n".join(lines) + "\n"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write

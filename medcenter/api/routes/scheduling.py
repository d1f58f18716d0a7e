"""
Scheduling API Endpoints.

Thin HTTP layer over the process-wide MedCenter. Scheduling errors are
turned into HTTP responses by the handlers registered in main.py.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from medcenter.core.scheduling import MedCenter, get_med_center

router = APIRouter(tags=["Scheduling"])


# === Request / response models ===


class SpecialtiesRequest(BaseModel):
    """Specialties to register."""

    specialties: list[str] = Field(..., min_length=1, examples=[["Cardiology", "Dermatology"]])


class DoctorRequest(BaseModel):
    """New doctor."""

    code: str = Field(..., min_length=1, examples=["D001"])
    name: str = Field(..., examples=["Mario"])
    surname: str = Field(..., examples=["Rossi"])
    specialty: str = Field(..., examples=["Cardiology"])


class DoctorResponse(BaseModel):
    code: str
    name: str
    surname: str


class ScheduleRequest(BaseModel):
    """Daily schedule definition."""

    date: str = Field(..., examples=["2023-06-28"])
    start: str = Field(..., examples=["09:00"])
    end: str = Field(..., examples=["12:00"])
    duration: int = Field(..., gt=0, description="Slot duration in minutes", examples=[30])


class ScheduleResponse(BaseModel):
    slots: int


class BookingRequest(BaseModel):
    """Appointment booking."""

    ssn: str = Field(..., min_length=1, examples=["RSSMRA70A01F205X"])
    name: str = Field(..., examples=["Anna"])
    surname: str = Field(..., examples=["Bianchi"])
    doctor: str = Field(..., description="Doctor code", examples=["D001"])
    date: str = Field(..., examples=["2023-06-28"])
    slot: str = Field(..., description="Slot as HH:MM-HH:MM", examples=["09:00-09:30"])


class BookingResponse(BaseModel):
    appointment_id: str


class AppointmentResponse(BaseModel):
    id: str
    doctor: str
    patient: str
    date: str
    time: str
    slot: str
    accepted: bool
    completed: bool


class CompletionRequest(BaseModel):
    doctor: str = Field(..., description="Doctor code")
    date: Optional[str] = Field(
        default=None,
        description="Date to check against instead of the current date",
    )


class CurrentDateRequest(BaseModel):
    date: str = Field(..., examples=["2023-06-28"])


class CurrentDateResponse(BaseModel):
    date: str
    appointments: int


class AcceptResponse(BaseModel):
    ssn: str
    known: bool


class NextAppointmentResponse(BaseModel):
    appointment_id: Optional[str] = None


class RatioResponse(BaseModel):
    value: float


# === Registry ===


@router.post("/specialties", status_code=status.HTTP_204_NO_CONTENT)
async def add_specialties(
    request: SpecialtiesRequest,
    center: MedCenter = Depends(get_med_center),
) -> None:
    center.add_specialties(*request.specialties)


@router.get("/specialties", response_model=list[str])
async def get_specialties(center: MedCenter = Depends(get_med_center)) -> list[str]:
    return center.get_specialties()


@router.get("/specialties/{specialty}/doctors", response_model=list[str])
async def get_specialists(
    specialty: str,
    center: MedCenter = Depends(get_med_center),
) -> list[str]:
    return center.get_specialists(specialty)


@router.post("/doctors", status_code=status.HTTP_201_CREATED, response_model=DoctorResponse)
async def add_doctor(
    request: DoctorRequest,
    center: MedCenter = Depends(get_med_center),
) -> DoctorResponse:
    center.add_doctor(request.code, request.name, request.surname, request.specialty)
    return DoctorResponse(code=request.code, name=request.name, surname=request.surname)


@router.get("/doctors/{code}", response_model=DoctorResponse)
async def get_doctor(code: str, center: MedCenter = Depends(get_med_center)) -> DoctorResponse:
    name = center.get_doctor_name(code)
    if name is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown doctor {code!r}")
    return DoctorResponse(code=code, name=name, surname=center.get_doctor_surname(code))


# === Calendar ===


@router.post(
    "/doctors/{code}/schedules",
    status_code=status.HTTP_201_CREATED,
    response_model=ScheduleResponse,
)
async def add_daily_schedule(
    code: str,
    request: ScheduleRequest,
    center: MedCenter = Depends(get_med_center),
) -> ScheduleResponse:
    count = center.add_daily_schedule(
        code, request.date, request.start, request.end, request.duration
    )
    return ScheduleResponse(slots=count)


@router.get("/slots", response_model=dict[str, list[str]])
async def find_slots(
    date: str = Query(..., description="YYYY-MM-DD"),
    specialty: str = Query(...),
    center: MedCenter = Depends(get_med_center),
) -> dict[str, list[str]]:
    return center.find_slots(date, specialty)


# === Appointments ===


@router.post(
    "/appointments",
    status_code=status.HTTP_201_CREATED,
    response_model=BookingResponse,
)
async def book_appointment(
    request: BookingRequest,
    center: MedCenter = Depends(get_med_center),
) -> BookingResponse:
    appointment_id = center.book_appointment(
        request.ssn,
        request.name,
        request.surname,
        request.doctor,
        request.date,
        request.slot,
    )
    return BookingResponse(appointment_id=appointment_id)


@router.get("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    center: MedCenter = Depends(get_med_center),
) -> AppointmentResponse:
    appointment = center.get_appointment(appointment_id)
    if appointment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown appointment {appointment_id!r}",
        )
    return AppointmentResponse(**appointment.to_dict())


@router.get("/doctors/{code}/appointments", response_model=list[str])
async def list_appointments(
    code: str,
    date: str = Query(..., description="YYYY-MM-DD"),
    center: MedCenter = Depends(get_med_center),
) -> list[str]:
    return center.list_appointments(code, date)


@router.post("/appointments/{appointment_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
async def complete_appointment(
    appointment_id: str,
    request: CompletionRequest,
    center: MedCenter = Depends(get_med_center),
) -> None:
    center.complete_appointment(request.doctor, appointment_id, on_date=request.date)


# === Arrivals ===


@router.put("/current-date", response_model=CurrentDateResponse)
async def set_current_date(
    request: CurrentDateRequest,
    center: MedCenter = Depends(get_med_center),
) -> CurrentDateResponse:
    count = center.set_current_date(request.date)
    return CurrentDateResponse(date=request.date, appointments=count)


@router.post("/patients/{ssn}/accept", response_model=AcceptResponse)
async def accept_patient(ssn: str, center: MedCenter = Depends(get_med_center)) -> AcceptResponse:
    return AcceptResponse(ssn=ssn, known=center.accept(ssn))


@router.get("/doctors/{code}/next", response_model=NextAppointmentResponse)
async def next_appointment(
    code: str,
    date: Optional[str] = Query(default=None, description="Overrides the current date"),
    center: MedCenter = Depends(get_med_center),
) -> NextAppointmentResponse:
    return NextAppointmentResponse(appointment_id=center.next_appointment(code, on_date=date))


# === Statistics ===


@router.get("/stats/show-rate", response_model=RatioResponse)
async def show_rate(
    doctor: str = Query(...),
    date: str = Query(...),
    center: MedCenter = Depends(get_med_center),
) -> RatioResponse:
    return RatioResponse(value=center.show_rate(doctor, date))


@router.get("/stats/completeness", response_model=dict[str, float])
async def schedule_completeness(center: MedCenter = Depends(get_med_center)) -> dict[str, float]:
    return center.schedule_completeness()


@router.get("/stats/completeness/{code}", response_model=RatioResponse)
async def doctor_completeness(code: str, center: MedCenter = Depends(get_med_center)) -> RatioResponse:
    return RatioResponse(value=center.doctor_completeness(code))
